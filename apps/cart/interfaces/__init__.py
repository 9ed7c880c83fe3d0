# Cart interfaces
