"""Terminal hosts for the editor."""
