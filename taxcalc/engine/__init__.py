"""Tax computation: slab tables, HRA, deduction aggregation, regime comparison."""
