"""HTTP read path for the homework calendar feed."""
