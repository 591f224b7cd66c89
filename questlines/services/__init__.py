"""Services Layer — aggregate persistence behind an injectable repository."""
