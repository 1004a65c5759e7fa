# /// script
# requires-python = ">=3.11"
# dependencies = [
#   "mudi",
# ]
# ///
#

"""
Build arrays from literal element lists, and print them element by element.
"""

import mudi

if __name__ == "__main__":
    array = mudi.array([3.0, 4.0, 5.0,
                        6.0, 7.0, 8.0,
                        9.0, 1.0, 2.0,
                        3.0, 4.0, 5.0], (4, 3))

    for coordinate, value in array.items():
        print(coordinate, value)
