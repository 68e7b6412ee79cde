"""Terminal UI for browsing commit history."""
