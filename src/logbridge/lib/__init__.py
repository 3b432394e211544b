"""Project-agnostic libraries bundled with logbridge."""
