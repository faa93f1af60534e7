"""Optix GraphQL mutation templates.

Tools built on these are tagged as mutations and refused by the dispatcher
unless ALLOW_MUTATIONS is enabled.
"""

from domain.query import QueryTemplate

CREATE_BOOKING = QueryTemplate(
    name="CREATE_BOOKING",
    description="Commit a new booking set for an account",
    document="""
mutation CreateBooking($input: BookingSetInput!) {
  bookingsCommit(input: $input) {
    booking_session_id
    account {
      account_id
      name
      email
    }
    bookings {
      booking_id
      title
      notes
      start_timestamp
      end_timestamp
      is_confirmed
      is_canceled
      is_recurring
      resource_id
    }
  }
}
""",
)

UPDATE_BOOKING = QueryTemplate(
    name="UPDATE_BOOKING",
    description="Reschedule, move or retitle an existing booking",
    document="""
mutation UpdateBooking($input: BookingSetInput!) {
  bookingsCommit(input: $input) {
    booking_session_id
    bookings {
      booking_id
      title
      notes
      start_timestamp
      end_timestamp
      is_confirmed
      is_canceled
      is_recurring
      resource_id
    }
  }
}
""",
)

CANCEL_BOOKING = QueryTemplate(
    name="CANCEL_BOOKING",
    description="Cancel a booking",
    document="""
mutation CancelBooking($booking_id: ID!) {
  bookingsCommit(input: { bookings: [{ booking_id: $booking_id, is_canceled: true }] }) {
    bookings {
      booking_id
      title
      start_timestamp
      end_timestamp
      is_canceled
    }
  }
}
""",
)

CREATE_MEMBER = QueryTemplate(
    name="CREATE_MEMBER",
    description="Create a user (member or lead)",
    document="""
mutation CreateMember(
  $email: String!
  $name: String
  $surname: String
  $phone: String
  $notify_user_by_email: Boolean
  $primary_location_id: ID
  $is_lead: Boolean
) {
  userCreate(
    email: $email
    name: $name
    surname: $surname
    phone: $phone
    notify_user_by_email: $notify_user_by_email
    primary_location_id: $primary_location_id
    is_lead: $is_lead
  ) {
    user_id
    name
    surname
    fullname
    email
    phone
    is_active
    is_lead
    is_pending
    user_since
  }
}
""",
)

UPDATE_MEMBER = QueryTemplate(
    name="UPDATE_MEMBER",
    description="Update account details of one or more accounts",
    document="""
mutation UpdateMember(
  $account: [AccountInput!]!
  $input: AccountDetailsInput!
) {
  accountsCommit(account: $account, input: $input) {
    total
    id
  }
}
""",
)


MUTATIONS: dict[str, QueryTemplate] = {
    t.name: t
    for t in (CREATE_BOOKING, UPDATE_BOOKING, CANCEL_BOOKING, CREATE_MEMBER, UPDATE_MEMBER)
}
