"""Core IR and compile stages.

WHY: The core package is the stable heart of the compiler: the rule
table IR and the dedup → data blob → assembly pipeline. Emitters and
the CLI consume it; it depends on nothing outside itself.

HOW: ir.py defines the data structures, dedup.py collects distinct
values, data_blob.py lays them out, assembler.py packs the final blob,
reader.py decodes it again and stats.py reports on a table.

RULES:
- IR dataclasses are the contract; change with care
- Compile stages are pure functions: no I/O, no global state
- The binary layout is fixed; see assembler.py
"""
