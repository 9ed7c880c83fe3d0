# Catalog domain
