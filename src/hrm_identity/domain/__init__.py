"""Identity domain model: principals, roles and role entities."""
