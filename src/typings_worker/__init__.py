"""Worker process that installs @types packages on behalf of a language server."""
