from intercom_relay.models import CamelCaseModel

DEFAULT_TICKET_TYPE_ICON = "🎟️"
LIST_DATA_TYPE = "list"


class TicketTypeCreateRequest(CamelCaseModel):
    name: str | None = None
    icon: str | None = DEFAULT_TICKET_TYPE_ICON
    is_internal: bool | None = True


class AttributeCreateRequest(CamelCaseModel):
    name: str | None = None
    data_type: str | None = None
    list_items: str | None = ""
    required_to_create: bool | None = True
    required_to_create_for_contacts: bool | None = False
    visible_on_create: bool | None = True
    visible_to_contacts: bool | None = False
