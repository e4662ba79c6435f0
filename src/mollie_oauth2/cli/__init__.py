"""Command line interface for mollie-oauth2."""
