"""Store, backends and derived views."""
