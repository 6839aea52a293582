"""Host pipeline integrations."""
