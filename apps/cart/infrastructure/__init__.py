# Cart infrastructure
