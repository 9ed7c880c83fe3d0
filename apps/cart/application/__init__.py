# Cart application layer
