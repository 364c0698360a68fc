"""api/routes/ -- One router module per resource."""
