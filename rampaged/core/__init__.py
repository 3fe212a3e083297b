"""Core paging and ordering helpers.

Files:
  pagination.py    — Pageable request model + PaginationParams dependency
  paged_list.py    — PagedList page container
  ordering.py      — sort-string parsing, alias resolution, ORDER BY building
  query.py         — where_if / include_if / paged / to_paged_list(_async)
  links.py         — pagination metadata + X-Pagination header
  registration.py  — add_paged() app wiring
  response.py      — JSON list/data envelopes
"""
