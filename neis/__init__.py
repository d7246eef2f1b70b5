"""Clients for the NEIS school open data API."""
