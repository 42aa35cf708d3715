"""Robot arena simulation: robots roaming a bounded grid."""
