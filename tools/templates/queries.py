"""Optix GraphQL query templates.

One canonical template per logical query. Field names follow the live Optix
schema (https://api.optixapp.com/graphql): paginated fields answer with
`{ data [...] total }`, identifiers are `<entity>_id`, time values are Unix
seconds.
"""

from domain.query import QueryTemplate

# ==================== Organization ====================

GET_ORGANIZATION_INFO = QueryTemplate(
    name="GET_ORGANIZATION_INFO",
    description="Authenticated user and organization settings",
    document="""
query GetOrganizationInfo {
  me {
    authType
    user {
      user_id
      name
      surname
      fullname
      email
    }
    organization {
      organization_id
      name
      subdomain
      timezone
      currency
      address
      city
      country
    }
  }
}
""",
)

# ==================== Bookings ====================

LIST_BOOKINGS = QueryTemplate(
    name="LIST_BOOKINGS",
    description="Paginated bookings filtered by time window, state, location and resource",
    document="""
query ListBookings(
  $limit: Int = 100
  $page: Int = 1
  $include_new: Boolean
  $include_approved: Boolean
  $include_completed: Boolean
  $start_timestamp_from: Int
  $start_timestamp_to: Int
  $location_id: [ID]
  $resource_id: [ID]
) {
  bookings(
    limit: $limit
    page: $page
    include_new: $include_new
    include_approved: $include_approved
    include_completed: $include_completed
    start_timestamp_from: $start_timestamp_from
    start_timestamp_to: $start_timestamp_to
    location_id: $location_id
    resource_id: $resource_id
  ) {
    data {
      booking_id
      title
      notes
      start_timestamp
      end_timestamp
      created_timestamp
      is_new
      is_approved
      is_canceled
      is_rejected
      account {
        account_id
        name
        type
        email
      }
      resource {
        resource_id
        name
        title
        location {
          location_id
          name
        }
      }
      user {
        user_id
        name
        email
      }
    }
    total
  }
}
""",
)

GET_BOOKING = QueryTemplate(
    name="GET_BOOKING",
    description="Single booking with account, resource and payment details",
    document="""
query GetBooking($booking_id: ID!) {
  booking(booking_id: $booking_id) {
    booking_id
    title
    notes
    start_timestamp
    end_timestamp
    created_timestamp
    is_new
    is_approved
    is_canceled
    is_rejected
    is_recurring
    source
    account {
      account_id
      name
      type
      email
      phone
    }
    resource {
      resource_id
      name
      title
      capacity
      location {
        location_id
        name
        address
      }
    }
    payment {
      unit_amount
      total
      price_description
      tax
    }
    user {
      user_id
      name
      email
    }
    invitees {
      email
      name
    }
  }
}
""",
)

CHECK_AVAILABILITY = QueryTemplate(
    name="CHECK_AVAILABILITY",
    description="A resource and the bookings that may overlap a time window",
    document="""
query CheckAvailability(
  $resource_id: [ID!]!
  $bookings_from: Int!
  $bookings_to: Int!
) {
  resources(resource_id: $resource_id) {
    data {
      resource_id
      name
      title
      is_bookable
      location {
        location_id
        name
      }
    }
  }
  bookings(
    resource_id: $resource_id
    start_timestamp_from: $bookings_from
    start_timestamp_to: $bookings_to
    include_new: true
    include_approved: true
    limit: 500
  ) {
    data {
      booking_id
      title
      start_timestamp
      end_timestamp
      is_new
      is_approved
      is_canceled
      is_rejected
    }
    total
  }
}
""",
)

GET_UPCOMING_SCHEDULE = QueryTemplate(
    name="GET_UPCOMING_SCHEDULE",
    description="Schedule events (bookings, assignments, tours, blocks) overlapping a window",
    document="""
query GetUpcomingSchedule(
  $limit: Int = 100
  $end_timestamp_from: Int
  $start_timestamp_to: Int
  $status: [ScheduleEventStatus!]
) {
  schedule(
    limit: $limit
    end_timestamp_from: $end_timestamp_from
    start_timestamp_to: $start_timestamp_to
    status: $status
  ) {
    data {
      type
      booking_id
      assignment_id
      tour_id
      availability_block_id
      title
      start_timestamp
      end_timestamp
      status
      is_recurring
      resource {
        resource_id
        name
      }
      location {
        location_id
        name
      }
      owner_account {
        account_id
        name
        email
      }
    }
    total
  }
}
""",
)

GET_BOOKING_STATS = QueryTemplate(
    name="GET_BOOKING_STATS",
    description="Bookings in a window with flags and payment totals, for statistics",
    document="""
query GetBookingStats(
  $start_timestamp_from: Int
  $start_timestamp_to: Int
  $location_id: [ID]
  $resource_id: [ID]
  $limit: Int = 1000
) {
  bookings(
    start_timestamp_from: $start_timestamp_from
    start_timestamp_to: $start_timestamp_to
    location_id: $location_id
    resource_id: $resource_id
    limit: $limit
    include_new: true
    include_approved: true
  ) {
    data {
      booking_id
      is_new
      is_approved
      is_canceled
      is_rejected
      start_timestamp
      end_timestamp
      payment {
        total
      }
      resource {
        resource_id
        name
      }
    }
    total
  }
}
""",
)

# ==================== Members ====================

LIST_MEMBERS = QueryTemplate(
    name="LIST_MEMBERS",
    description="Paginated member accounts, optionally searched by name or email",
    document="""
query ListMembers(
  $limit: Int = 100
  $page: Int = 1
  $search: String
) {
  accounts(
    type: ["Member"]
    limit: $limit
    page: $page
    search: $search
  ) {
    data {
      account_id
      name
      email
      phone
      status
      created_timestamp
    }
    total
  }
}
""",
)

SEARCH_MEMBERS = QueryTemplate(
    name="SEARCH_MEMBERS",
    description="Member accounts matching a search term",
    document="""
query SearchMembers(
  $search: String!
  $limit: Int = 20
) {
  accounts(
    type: ["Member"]
    search: $search
    limit: $limit
  ) {
    data {
      account_id
      name
      email
      status
    }
    total
  }
}
""",
)

GET_MEMBER = QueryTemplate(
    name="GET_MEMBER",
    description="Full member profile",
    document="""
query GetMember($account: AccountInput!) {
  account(account: $account) {
    account_id
    name
    type
    email
    phone
    status
    created_timestamp
    company
    title
    profession
    industry
    description
    city
    country
    website
    linkedin
    twitter
    source
    is_checked_in
    primary_location {
      location_id
      name
      address
      city
      country
    }
    enable_autopayments
    require_payment_method
    next_invoicing_timestamp
  }
}
""",
)

GET_MEMBER_STATS = QueryTemplate(
    name="GET_MEMBER_STATS",
    description="All accounts with status and type, for statistics",
    document="""
query GetMemberStats($limit: Int = 1000) {
  accounts(limit: $limit) {
    data {
      account_id
      name
      type
      status
      created_timestamp
    }
    total
  }
}
""",
)

# ==================== Resources ====================

LIST_RESOURCES = QueryTemplate(
    name="LIST_RESOURCES",
    description="Paginated resources (rooms, desks, offices) with type and location",
    document="""
query ListResources(
  $limit: Int = 100
  $page: Int = 1
  $location_id: [ID!]
  $name: String
  $is_bookable: Boolean
  $resource_type_id: [ID!]
) {
  resources(
    limit: $limit
    page: $page
    location_id: $location_id
    name: $name
    is_bookable: $is_bookable
    resource_type_id: $resource_type_id
  ) {
    data {
      resource_id
      name
      title
      description
      capacity
      is_bookable
      is_assignable
      type {
        resource_type_id
        name
        booking_experience
      }
      location {
        location_id
        name
      }
    }
    total
  }
}
""",
)

GET_RESOURCE = QueryTemplate(
    name="GET_RESOURCE",
    description="Single resource with type and location",
    document="""
query GetResource($resource_id: ID!) {
  resource(resource_id: $resource_id) {
    resource_id
    name
    title
    description
    capacity
    is_bookable
    is_assignable
    type {
      resource_type_id
      name
      booking_experience
    }
    location {
      location_id
      name
      address
      timezone
    }
  }
}
""",
)

GET_RESOURCE_SCHEDULE = QueryTemplate(
    name="GET_RESOURCE_SCHEDULE",
    description="Bookings and schedule events of one resource inside a window",
    document="""
query GetResourceSchedule(
  $resource_id: ID!
  $start_timestamp_from: Int!
  $start_timestamp_to: Int!
) {
  bookings(
    resource_id: [$resource_id]
    start_timestamp_from: $start_timestamp_from
    start_timestamp_to: $start_timestamp_to
    include_new: true
    include_approved: true
    include_completed: true
  ) {
    data {
      booking_id
      start_timestamp
      end_timestamp
      is_new
      is_approved
      is_canceled
      is_rejected
      account {
        account_id
        name
      }
    }
    total
  }
  schedule(
    resource: { resource_id: [$resource_id] }
    start_timestamp_from: $start_timestamp_from
    start_timestamp_to: $start_timestamp_to
  ) {
    data {
      booking_id
      type
      start_timestamp
      end_timestamp
      status
      title
    }
    total
  }
}
""",
)

# ==================== Plan templates ====================

LIST_PLAN_TEMPLATES = QueryTemplate(
    name="LIST_PLAN_TEMPLATES",
    description="Paginated membership plan templates with pricing",
    document="""
query ListPlanTemplates(
  $limit: Int = 100
  $page: Int = 1
  $name: String
  $location_id: [ID!]
) {
  planTemplates(
    limit: $limit
    page: $page
    name: $name
    location_id: $location_id
  ) {
    data {
      plan_template_id
      name
      description
      price_frequency
      allowance_renewal_frequency
      price
      deposit
      set_up_fee
      in_all_locations
      locations {
        location_id
        name
      }
    }
    total
  }
}
""",
)

GET_PLAN_TEMPLATE = QueryTemplate(
    name="GET_PLAN_TEMPLATE",
    description="Single plan template",
    document="""
query GetPlanTemplate($plan_template_id: ID!) {
  planTemplate(plan_template_id: $plan_template_id) {
    plan_template_id
    name
    description
    price_frequency
    allowance_renewal_frequency
    price
    deposit
    set_up_fee
    in_all_locations
    locations {
      location_id
      name
    }
  }
}
""",
)


QUERIES: dict[str, QueryTemplate] = {
    t.name: t
    for t in (
        GET_ORGANIZATION_INFO,
        LIST_BOOKINGS,
        GET_BOOKING,
        CHECK_AVAILABILITY,
        GET_UPCOMING_SCHEDULE,
        GET_BOOKING_STATS,
        LIST_MEMBERS,
        SEARCH_MEMBERS,
        GET_MEMBER,
        GET_MEMBER_STATS,
        LIST_RESOURCES,
        GET_RESOURCE,
        GET_RESOURCE_SCHEDULE,
        LIST_PLAN_TEMPLATES,
        GET_PLAN_TEMPLATE,
    )
}
