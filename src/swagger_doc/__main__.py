"""Entry point for running swagger-doc as a module.

Usage:
    python -m swagger_doc SPEC_PATH [options]
"""

from swagger_doc.cli import main

if __name__ == "__main__":
    main()
