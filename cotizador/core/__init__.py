"""Shared configuration: truck catalog, paths, security headers, startup checks."""
