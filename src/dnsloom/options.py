"""Options accepted by the "list" operations: pagination, sorting and filtering.

The classes here only accumulate intent and unpack it into ordered key/value
pairs ready for the query string; they know nothing about HTTP. Resource
specific option classes expose chainable helpers named after the fields the
API accepts for that resource:

```python
options = ZoneRecordsListOptions().sort_by_id(SortOrder.ASC).filter_by_type("A")
options.pagination = Pagination(per_page=50, page=2)
```
"""

from pydantic import BaseModel, ConfigDict, Field

from .constants import DEFAULT_PAGE, DEFAULT_PER_PAGE, SortOrder


class Sort(BaseModel):
    """A single sort criterion."""

    field: str
    order: SortOrder

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.field}:{self.order.value}"


class Filter(BaseModel):
    """A single filter criterion."""

    field: str
    value: str

    model_config = ConfigDict(frozen=True)


class Pagination(BaseModel):
    """Page selection sent with a list request.

    Values are passed through as given; the API is the one rejecting
    out-of-range pages.
    """

    page: int = Field(default=DEFAULT_PAGE)
    per_page: int = Field(default=DEFAULT_PER_PAGE)

    def is_default(self) -> bool:
        return self.page == DEFAULT_PAGE and self.per_page == DEFAULT_PER_PAGE


class ListOptions:
    """Common options for a "list" call: pagination and sorting."""

    def __init__(self) -> None:
        self._sort_criteria: list[Sort] = []
        self.pagination: Pagination = Pagination()

    def add_sort(self, field: str, order: SortOrder) -> None:
        """Appends a sort criterion. Repeated fields are kept."""
        self._sort_criteria.append(Sort(field=field, order=order))

    def has_sorting_options(self) -> bool:
        return len(self._sort_criteria) > 0

    def unpack_sorting(self) -> tuple[str, str] | None:
        """Returns the single ``("sort", "f1:o1,f2:o2")`` pair, or None when unsorted."""
        if not self._sort_criteria:
            return None
        return "sort", ",".join(str(sort) for sort in self._sort_criteria)

    def has_filter_options(self) -> bool:
        return False

    def unpack_filters(self) -> list[tuple[str, str]]:
        return []

    def unpack_pagination(self) -> list[tuple[str, str]]:
        return [
            ("per_page", str(self.pagination.per_page)),
            ("page", str(self.pagination.page)),
        ]


class ListOptionsWithFiltering(ListOptions):
    """Common options for a "list" call: pagination, sorting and filtering."""

    def __init__(self) -> None:
        super().__init__()
        self._filters: list[Filter] = []

    def add_filter(self, field: str, value: str) -> None:
        """Appends a filter criterion. Repeated fields are kept."""
        self._filters.append(Filter(field=field, value=value))

    def has_filter_options(self) -> bool:
        return len(self._filters) > 0

    def unpack_filters(self) -> list[tuple[str, str]]:
        return [(f.field, f.value) for f in self._filters]


class DomainListOptions(ListOptionsWithFiltering):
    """Options for listing domains."""

    def sort_by_id(self, order: SortOrder) -> "DomainListOptions":
        self.add_sort("id", order)
        return self

    def sort_by_name(self, order: SortOrder) -> "DomainListOptions":
        self.add_sort("name", order)
        return self

    def sort_by_expiration(self, order: SortOrder) -> "DomainListOptions":
        self.add_sort("expiration", order)
        return self

    def filter_by_name(self, name: str) -> "DomainListOptions":
        """Only include domains containing the given string."""
        self.add_filter("name_like", name)
        return self

    def filter_by_registrant_id(self, registrant_id: int) -> "DomainListOptions":
        self.add_filter("registrant_id", str(registrant_id))
        return self


class ZonesListOptions(ListOptionsWithFiltering):
    """Options for listing zones."""

    def sort_by_id(self, order: SortOrder) -> "ZonesListOptions":
        self.add_sort("id", order)
        return self

    def sort_by_name(self, order: SortOrder) -> "ZonesListOptions":
        self.add_sort("name", order)
        return self

    def filter_by_name(self, name: str) -> "ZonesListOptions":
        """Only include zones containing the given string."""
        self.add_filter("name_like", name)
        return self


class ZoneRecordsListOptions(ListOptionsWithFiltering):
    """Options for listing the records of a zone."""

    def sort_by_id(self, order: SortOrder) -> "ZoneRecordsListOptions":
        self.add_sort("id", order)
        return self

    def sort_by_name(self, order: SortOrder) -> "ZoneRecordsListOptions":
        self.add_sort("name", order)
        return self

    def sort_by_content(self, order: SortOrder) -> "ZoneRecordsListOptions":
        self.add_sort("content", order)
        return self

    def sort_by_type(self, order: SortOrder) -> "ZoneRecordsListOptions":
        self.add_sort("type", order)
        return self

    def filter_by_name(self, name: str) -> "ZoneRecordsListOptions":
        """Only include records containing the given string."""
        self.add_filter("name_like", name)
        return self

    def filter_by_exact_name(self, name: str) -> "ZoneRecordsListOptions":
        """Only include records with name equal to the given string."""
        self.add_filter("name", name)
        return self

    def filter_by_type(self, record_type: str) -> "ZoneRecordsListOptions":
        self.add_filter("type", record_type)
        return self


class DelegationSignerRecordsListOptions(ListOptions):
    """Options for listing the delegation signer records of a domain."""

    def sort_by_id(self, order: SortOrder) -> "DelegationSignerRecordsListOptions":
        self.add_sort("id", order)
        return self

    def sort_by_created_at(
        self, order: SortOrder
    ) -> "DelegationSignerRecordsListOptions":
        self.add_sort("created_at", order)
        return self


class ContactsListOptions(ListOptions):
    """Options for listing contacts."""

    def sort_by_id(self, order: SortOrder) -> "ContactsListOptions":
        self.add_sort("id", order)
        return self

    def sort_by_label(self, order: SortOrder) -> "ContactsListOptions":
        self.add_sort("label", order)
        return self

    def sort_by_email(self, order: SortOrder) -> "ContactsListOptions":
        self.add_sort("email", order)
        return self
