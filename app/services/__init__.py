"""Services: persistence glue between the API, the ORM and the training engine."""
