"""Git, GitHub and Terraform workflow shortcuts."""

__version__ = "1.0.0"
