# Cross-cutting domain, application and interface building blocks
