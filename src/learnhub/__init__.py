"""LearnHub chat backend."""
