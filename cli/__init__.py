"""assetpipe command line interface."""
