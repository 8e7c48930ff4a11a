"""Graph analysis: reachability closures and tag matching."""
