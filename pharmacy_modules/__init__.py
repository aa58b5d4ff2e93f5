"""Business modules built on the pharmacy kernel: inventory and sales."""
