"""Quote request validation, es-MX formatting, and quote PDF assembly.

Key exports:
    parse_quote_request()   — Validate a JSON payload into a QuoteRequest
    generate_quote_pdf()    — Assemble spec pages + summary page into PDF bytes
    build_filename()        — Download filename for an assembled quote
"""
