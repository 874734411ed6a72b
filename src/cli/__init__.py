"""Terminal shell around the address book core."""
