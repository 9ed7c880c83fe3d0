# Cart domain
