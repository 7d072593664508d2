"""Services for the RideShare dispatcher."""
