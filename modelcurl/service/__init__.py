"""HTTP service and command-line surfaces for modelcurl."""
