"""Command line interface for the RideShare dispatcher."""
