"""Command line entry points for the month grid."""
