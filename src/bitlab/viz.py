from __future__ import annotations
from .binary import sequence
from .binary.reader import BytesLike, load_bytes

def render_field(data: BytesLike, byte_offset: int, bit_offset: int, width: int, *, context: int = 0):
    """Bit grid of the bytes a field spans (8 columns, MSB left), field cells highlighted."""
    import matplotlib.pyplot as plt
    from matplotlib.patches import Rectangle

    if context < 0:
        raise ValueError(f"context must be >= 0, got {context}")
    raw = load_bytes(data)
    view, address = sequence.address_of(raw, byte_offset, bit_offset, width)
    first = max(0, address.start_byte - context)
    last = min(len(view) - 1, address.last_byte + context)
    rows = range(first, last + 1)

    fig, ax = plt.subplots(figsize=(5, 0.5 * len(rows) + 1.2))
    for row, index in enumerate(rows):
        byte = view.byte(index)
        for col in range(8):
            inside = address.absolute <= index * 8 + col < address.end
            ax.add_patch(Rectangle((col, row), 1, 1,
                                   facecolor="tab:orange" if inside else "white",
                                   edgecolor="black"))
            ax.text(col + 0.5, row + 0.5, str((byte >> (7 - col)) & 1), ha="center", va="center")

    ax.set_xlim(0, 8)
    ax.set_ylim(len(rows), 0)
    ax.set_xticks([c + 0.5 for c in range(8)])
    ax.set_xticklabels([str(c) for c in range(8)])
    ax.set_yticks([r + 0.5 for r in range(len(rows))])
    ax.set_yticklabels([f"{i} (0x{view.byte(i):02X})" for i in rows])
    ax.set_xlabel("Bit offset")
    ax.set_ylabel("Byte")
    ax.set_title(f"bits {address.absolute}..{address.end - 1} (width {width})")
    return fig

def plot_field(data: BytesLike, byte_offset: int, bit_offset: int, width: int, *, context: int = 0):
    import matplotlib.pyplot as plt
    render_field(data, byte_offset, bit_offset, width, context=context)
    plt.show()
