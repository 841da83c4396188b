"""Console front end: menu loop and command handlers over ContactDirectory."""
