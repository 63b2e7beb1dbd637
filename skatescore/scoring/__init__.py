"""
scoring/ - Figure-skating element scoring

Modules:
    utils.py                  - Decimal utilities
    sov.py                    - Scale of Values table and base value adapter
    element_calculator.py     - Base value, GOE value and element score per row
    program_calculator.py     - TES / PCS / TSS aggregation
    notation.py               - Protocol text formatting and parsing
    element_builder.py        - Mutable draft of the row being entered
    program_sheet.py          - Ordered rows with add / edit / delete / reorder
"""
