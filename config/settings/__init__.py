# Settings split: base / local / test
