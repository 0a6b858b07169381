"""
Procurement Domain - Purchase orders.

This domain handles ordering goods from suppliers:
- A PurchaseOrder references its supplier by SupplierId only
- Items are appended through the order, always priced in the order currency
- Line and order totals are derived on demand, never stored
"""
