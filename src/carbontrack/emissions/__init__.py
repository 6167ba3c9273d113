"""Emission factors, unit conversion and emissions calculation."""
