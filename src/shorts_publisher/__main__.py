"""Allow running as: python -m shorts_publisher"""

from .cli import main

if __name__ == "__main__":
    main()
