import sys

from beautiful_dogs.main import main

if __name__ == "__main__":
    sys.exit(main())
