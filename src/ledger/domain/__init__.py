"""Domain layer: account entities, capabilities and business rules."""
