"""Ichibetsu: local shop discovery service."""
