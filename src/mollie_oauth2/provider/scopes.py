"""Mollie OAuth permission scopes.

Request the scopes matching the API endpoints your app calls on behalf of
the merchant. See https://docs.mollie.com/oauth/permissions.
"""

SCOPE_PAYMENTS_READ = "payments.read"
SCOPE_PAYMENTS_WRITE = "payments.write"
SCOPE_REFUNDS_READ = "refunds.read"
SCOPE_REFUNDS_WRITE = "refunds.write"
SCOPE_CUSTOMERS_READ = "customers.read"
SCOPE_CUSTOMERS_WRITE = "customers.write"
SCOPE_MANDATES_READ = "mandates.read"
SCOPE_MANDATES_WRITE = "mandates.write"
SCOPE_SUBSCRIPTIONS_READ = "subscriptions.read"
SCOPE_SUBSCRIPTIONS_WRITE = "subscriptions.write"
SCOPE_PROFILES_READ = "profiles.read"
SCOPE_PROFILES_WRITE = "profiles.write"
SCOPE_INVOICES_READ = "invoices.read"
SCOPE_SETTLEMENTS_READ = "settlements.read"
SCOPE_ORDERS_READ = "orders.read"
SCOPE_ORDERS_WRITE = "orders.write"
SCOPE_SHIPMENTS_READ = "shipments.read"
SCOPE_SHIPMENTS_WRITE = "shipments.write"
SCOPE_ORGANIZATIONS_READ = "organizations.read"
SCOPE_ORGANIZATIONS_WRITE = "organizations.write"
SCOPE_ONBOARDING_READ = "onboarding.read"
SCOPE_ONBOARDING_WRITE = "onboarding.write"
SCOPE_PAYMENT_LINKS_READ = "payment-links.read"
SCOPE_PAYMENT_LINKS_WRITE = "payment-links.write"
SCOPE_BALANCES_READ = "balances.read"
SCOPE_TERMINALS_READ = "terminals.read"
SCOPE_TERMINALS_WRITE = "terminals.write"
