# Cart consistency context
