"""Chart assembly.

Maps aggregation output plus the shared vocabularies into ordered, coloured
series (`datasets`) and wires filter state, predicate, aggregation and
assembly together per dashboard chart (`views`).
"""
