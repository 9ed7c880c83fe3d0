# Catalog interfaces
