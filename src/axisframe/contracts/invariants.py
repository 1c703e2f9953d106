"""Formal variable invariants.

This file documents what each component MUST guarantee. This is architecture, not code.
Use this file as a reviewer anchor and system reference.
"""

VARIABLE_INVARIANTS = {
    "axis": [
        "Labels are unique (label <-> position is a bijection)",
        "Positions are dense and zero-based",
        "Label order is significant and stable",
    ],

    "dimension_mapping": [
        "Dimension names are unique",
        "Rank of a name is its position in the mapping",
    ],

    "positional_slice": [
        "size is fixed at construction and never mutated",
        "revert(apply(i)) == i for every i < size",
        "SteppedRange step is strictly positive",
    ],

    "label_slice": [
        "Both boundary labels are inclusive",
        "No axis is touched until resolve(axis) is called",
    ],

    "variable": [
        "storage.shape()[dims[name]] == coords[name].size() for every dimension",
        "resize/reshape are the only operations that change coordinate and shape",
        "Positional access takes exactly one position per dimension",
        "The missing sentinel is returned only by outer-join selection, never stored",
    ],
}

# Which failures each access path may surface
ACCESS_FAILURES = {
    "at": "ContractViolation (arity)",
    "locate": "LabelNotFoundError",
    "select/inner": "LabelNotFoundError, DimensionNotFoundError",
    "select/outer": "none (missing sentinel)",
    "iselect": "IndexError, DimensionNotFoundError",
    "assign": "LabelNotFoundError, DimensionNotFoundError",
}
