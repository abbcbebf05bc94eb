"""Command line harnesses around the smallfast generator."""
