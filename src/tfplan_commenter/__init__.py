"""Render Terraform plan JSON as Markdown pull-request comments."""

__version__ = "0.1.0"
