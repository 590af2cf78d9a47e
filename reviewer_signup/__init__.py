"""reviewer-signup - Reviewer account signup service."""
