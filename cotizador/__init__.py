"""
Cotizador SHACMAN — Truck quotation generator

Packages:
    api/        Quote form page and PDF endpoint
    forms/      Request validation, formatting and quote PDF assembly
    core/       Truck catalog, paths, security headers and startup checks
"""
