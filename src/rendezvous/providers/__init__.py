"""Provider integrations for push delivery and TURN credential issuance."""
