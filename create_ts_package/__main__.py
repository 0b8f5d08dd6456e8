"""Allow ``python -m create_ts_package``."""

from create_ts_package.pipeline import main

if __name__ == "__main__":
    main()
