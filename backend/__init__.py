"""Financial-planning calculator: data model, projection engine and REST API."""
