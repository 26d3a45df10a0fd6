"""
Secure Variable - inspection example

Builds a plaintext and an encrypted variable for a string and a number and
prints each container next to its read detail.
"""

import math
from pprint import pprint

from secure_variable import SecureVariable, configure_logging, load_config


def show(label, value, password, algorithm):
    plain = SecureVariable(value, algorithm=algorithm)
    sealed = SecureVariable(value, password, algorithm=algorithm)

    print(f"{label} / plain text:")
    pprint({"object": plain, "read": plain.read().to_dict()})
    print(f"{label} / encrypted:")
    pprint({"object": sealed, "read": sealed.read(password).to_dict()})
    print()


def main():
    config = load_config()
    configure_logging(config)
    password = "secure"

    show("string", "Secret Text", password, config.algorithm)
    show("number", math.pi, password, config.algorithm)


if __name__ == "__main__":
    main()
