# /// script
# requires-python = ">=3.11"
# dependencies = [
#   "mudi",
# ]
# ///
#

"""
Fill an array coordinate by coordinate, then read it back in storage order.
"""

import mudi

if __name__ == "__main__":
    array = mudi.full((5, 2, range(-4, 5)), 0.0)

    # iterations using the shape of the array
    nx, ny, nz = array.shape()
    for i in nx.indices():
        for j in ny.indices():
            for k in nz.indices():
                array[i, j, k] = float(i + j + k)

    # linear iteration over the array, in row-major order
    print(" ".join(str(value) for value in array.flat_iter()))
