"""
Walk through the Matrix API on a small sample matrix.

Run with:
    python examples/demo.py
"""

from densematrix import Matrix
from densematrix.io import dumps_binary, dumps_text, loads_binary, loads_text


def print_separator() -> None:
    print("-" * 40)


def main() -> None:
    matrix = Matrix.from_rows([
        [2, 5, 7],
        [6, 3, 4],
        [5, -2, -3],
    ])

    print(f"Source matrix (3x3):\n{matrix}")
    print_separator()

    print(f"Transpose:\n{matrix.transpose()}")
    print_separator()

    print(f"Determinant: {matrix.determinant()}\n")
    inv = matrix.inverse()
    print(f"Inverse:\n{inv}\n")
    print(f"Matrix @ inverse (should be the identity):\n{matrix @ inv}\n")
    print_separator()

    print(f"Matrix * 2:\n{matrix * 2}\n")
    print_separator()

    resized = matrix.copy()
    resized.resize_rows(2)
    resized.resize_cols(2)
    print(f"After resize_rows(2) and resize_cols(2):\n{resized}\n")
    print_separator()

    print(f"Minor (2, 2):\n{matrix.minor(2, 2)}")
    print_separator()

    text = dumps_text(matrix)
    print(f"Saved as text:\n{text}")
    print(f"Loaded from text:\n{loads_text(text)}")
    print_separator()

    data = dumps_binary(matrix)
    print("Saved as binary:")
    print(data.hex(" "))
    print()
    print(f"Loaded from binary:\n{loads_binary(data)}")


if __name__ == "__main__":
    main()
