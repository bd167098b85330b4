"""Allow running as python -m codepointe"""

from .cli.main import main

main()
