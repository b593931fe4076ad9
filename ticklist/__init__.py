"""ticklist - a small terminal to-do list."""
