# Catalog lookup context
