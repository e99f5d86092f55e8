"""grocerybill: itemized grocery bills with preferred-customer discounts."""
