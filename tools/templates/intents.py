"""Templates for the generate-query intents without a business tool.

Intents that name an operation already covered by a canonical template
(bookings, booking details, resources) reuse that template instead.
"""

from domain.query import QueryTemplate

LIST_USERS = QueryTemplate(
    name="LIST_USERS",
    document="""
query Users($page: Int = 1, $limit: Int = 50) {
  users(page: $page, limit: $limit) {
    total
    data { user_id fullname email is_active is_lead }
  }
}
""",
)

USER_BY_EMAIL = QueryTemplate(
    name="USER_BY_EMAIL",
    document="""
query UserByEmail($email: String!) {
  user(get_by_email: $email) { user_id fullname email is_admin is_active }
}
""",
)

RESOURCE_AVAILABILITY = QueryTemplate(
    name="RESOURCE_AVAILABILITY",
    document="""
query ResourceAvailability($start: Int!, $end: Int!, $locationId: [ID!], $resourceId: [ID!]) {
  resourceAvailability(
    input: {
      start_timestamp: $start
      end_timestamp: $end
      resource: { location_id: $locationId, resource_id: $resourceId }
    }
  ) {
    resource_id
    score
    availability { start_timestamp end_timestamp }
  }
}
""",
)

LIST_INVOICES = QueryTemplate(
    name="LIST_INVOICES",
    document="""
query Invoices($page: Int = 1, $limit: Int = 50) {
  invoices(page: $page, limit: $limit) {
    total
    data { invoice_id status due_timestamp total balance account { account_id name } }
  }
}
""",
)

INVOICE_DETAILS = QueryTemplate(
    name="INVOICE_DETAILS",
    document="""
query Invoice($invoiceId: ID!) {
  invoice(invoice_id: $invoiceId) {
    invoice_id
    status
    due_timestamp
    total
    balance
    items { item_id name quantity total }
    billing_details { name email address city country }
  }
}
""",
)

LIST_CONVERSATIONS = QueryTemplate(
    name="LIST_CONVERSATIONS",
    document="""
query Conversations($orgId: ID, $limit: Int = 200) {
  conversations(organization_id: $orgId, limit: $limit) {
    total
    data {
      conversation_id
      name
      conversation_type
      latest_message { message_id message timestamp }
      unread_message_count
    }
  }
}
""",
)
