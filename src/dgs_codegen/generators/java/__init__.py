"""Java (Netflix DGS) source generation."""
