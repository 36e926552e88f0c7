"""prompt_toolkit front end for the launcher."""
