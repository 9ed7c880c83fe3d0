# Catalog infrastructure
