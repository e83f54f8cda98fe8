"""HTTP API for the LearnHub chat core."""
