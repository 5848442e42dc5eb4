"""Guest record endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import HTMLResponse

from guest_registry.api.models import (
    GuestListResponse,
    GuestPayload,
    GuestResponse,
)
from guest_registry.domain.guests import SortKey
from guest_registry.services.view_filter import filter_guests

if TYPE_CHECKING:
    from guest_registry.services.sync import SyncController

router = APIRouter(prefix="/guests", tags=["guests"])


def _controller(request: Request) -> SyncController:
    return request.app.state.container.api_controller


@router.get("", response_model=GuestListResponse)
async def list_guests(
    request: Request, search: str = "", sort: SortKey = SortKey.NAME
) -> GuestListResponse:
    """Return all guests matching ``search``, ordered by ``sort``."""
    guests = await _controller(request).fetch_all()
    return GuestListResponse(
        guests=[
            GuestResponse.from_record(guest)
            for guest in filter_guests(guests, search, sort)
        ]
    )


@router.post("", response_model=GuestResponse, status_code=status.HTTP_201_CREATED)
async def create_guest(payload: GuestPayload, request: Request) -> GuestResponse:
    """Create a guest."""
    created = await _controller(request).create(payload.to_draft())
    return GuestResponse.from_record(created)


@router.get("/ui", response_class=HTMLResponse, include_in_schema=False)
async def guests_ui() -> HTMLResponse:
    """Console for listing, adding, editing and deleting guests."""
    return HTMLResponse(_GUESTS_UI_HTML)


@router.get("/{guest_id}", response_model=GuestResponse)
async def get_guest(guest_id: str, request: Request) -> GuestResponse:
    """Return a single guest."""
    guest = await _controller(request).fetch_one(guest_id)
    return GuestResponse.from_record(guest)


@router.put("/{guest_id}", response_model=GuestResponse)
async def update_guest(
    guest_id: str, payload: GuestPayload, request: Request
) -> GuestResponse:
    """Replace all mutable fields of a guest."""
    updated = await _controller(request).update(guest_id, payload.to_draft())
    return GuestResponse.from_record(updated)


@router.delete("/{guest_id}")
async def delete_guest(
    guest_id: str, request: Request, confirm: bool = False
) -> dict[str, str]:
    """Delete a guest. Requires ``confirm=true``."""
    deleted = await _controller(request).delete(guest_id, confirmed=confirm)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Deletion must be confirmed with confirm=true.",
        )
    return {"status": "deleted"}


_GUESTS_UI_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Hotel Guest Management</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      h1 { margin-bottom: 0.5rem; }
      .row { margin-bottom: 1rem; }
      input, select { padding: 0.4rem 0.6rem; }
      button { padding: 0.4rem 0.8rem; margin-right: 0.5rem; }
      table { border-collapse: collapse; }
      td, th { padding: 0.3rem 0.8rem; border-bottom: 1px solid #ddd; text-align: left; }
      form label { display: block; margin-bottom: 0.5rem; }
      .error { color: #b91c1c; }
      [hidden] { display: none; }
    </style>
  </head>
  <body>
    <h1>Hotel Guest Management</h1>
    <section id="list-screen">
      <div class="row">
        <input id="search" placeholder="Search guests..." oninput="render()" />
        <select id="sort" onchange="loadGuests()">
          <option value="name">Sort by Name</option>
          <option value="email">Sort by Email</option>
        </select>
        <button onclick="loadGuests()">Reload</button>
        <button onclick="showCreate()">Add Guest</button>
      </div>
      <p id="status">Loading guests...</p>
      <table>
        <thead>
          <tr><th>Name</th><th>Email</th><th>Phone</th><th>Address</th><th>DOB</th><th></th></tr>
        </thead>
        <tbody id="rows"></tbody>
      </table>
    </section>
    <section id="form-screen" hidden>
      <h2 id="form-title">Add Guest</h2>
      <form id="guest-form" onsubmit="submitGuest(event)">
        <label>First name <input name="first_name" required /></label>
        <label>Last name <input name="last_name" required /></label>
        <label>Email <input name="email" type="email" required /></label>
        <label>Phone <input name="phone" /></label>
        <label>Address <input name="address" /></label>
        <label>Date of birth <input name="date_of_birth" type="date" /></label>
        <p id="form-error" class="error"></p>
        <button id="form-submit" type="submit">Save</button>
        <button id="form-delete" type="button" onclick="removeGuest(editing)" hidden>Delete</button>
        <button type="button" onclick="leaveForm()">Back</button>
      </form>
    </section>
    <script>
      const FIELDS = ['first_name', 'last_name', 'email', 'phone', 'address', 'date_of_birth'];
      let guests = [];
      let editing = null;
      let busy = false;
      async function loadGuests() {
        const status = document.getElementById('status');
        status.className = '';
        status.textContent = 'Loading guests...';
        const sort = document.getElementById('sort').value;
        const res = await fetch('/guests?sort=' + encodeURIComponent(sort));
        const data = await res.json();
        if (!res.ok) {
          status.className = 'error';
          status.textContent = data.detail;
          return;
        }
        guests = data.guests;
        render();
      }
      function render() {
        const term = document.getElementById('search').value.toLowerCase();
        const rows = document.getElementById('rows');
        const shown = guests.filter((g) =>
          (g.first_name + ' ' + g.last_name).toLowerCase().includes(term) ||
          g.email.toLowerCase().includes(term));
        document.getElementById('status').textContent =
          shown.length ? '' : 'No guests found.';
        rows.innerHTML = '';
        for (const g of shown) {
          const tr = document.createElement('tr');
          for (const value of [g.first_name + ' ' + g.last_name, g.email,
                               g.phone || '-', g.address || '-', g.date_of_birth || '-']) {
            const td = document.createElement('td');
            td.textContent = value;
            tr.appendChild(td);
          }
          const action = document.createElement('td');
          const button = document.createElement('button');
          button.textContent = 'Edit';
          button.onclick = () => showEdit(g);
          action.appendChild(button);
          tr.appendChild(action);
          rows.appendChild(tr);
        }
      }
      function showForm(title, guest) {
        const form = document.getElementById('guest-form');
        for (const name of FIELDS) {
          form.elements[name].value = (guest && guest[name]) || '';
        }
        document.getElementById('form-title').textContent = title;
        document.getElementById('form-error').textContent = '';
        document.getElementById('form-delete').hidden = !guest;
        document.getElementById('list-screen').hidden = true;
        document.getElementById('form-screen').hidden = false;
      }
      function showCreate() {
        editing = null;
        showForm('Add Guest', null);
      }
      function showEdit(g) {
        editing = g;
        showForm('Edit Guest', g);
      }
      function leaveForm() {
        if (busy) {
          return;
        }
        if (!editing && !confirm('Are you sure you want to cancel? Any unsaved changes will be lost.')) {
          return;
        }
        closeForm();
      }
      function closeForm() {
        editing = null;
        document.getElementById('form-screen').hidden = true;
        document.getElementById('list-screen').hidden = false;
        loadGuests();
      }
      async function submitGuest(event) {
        event.preventDefault();
        if (busy) {
          return;
        }
        const form = document.getElementById('guest-form');
        const body = {};
        for (const name of FIELDS) {
          body[name] = form.elements[name].value;
        }
        busy = true;
        document.getElementById('form-submit').disabled = true;
        const url = editing ? '/guests/' + editing.id : '/guests';
        const res = await fetch(url, {
          method: editing ? 'PUT' : 'POST',
          headers: { 'Content-Type': 'application/json' },
          body: JSON.stringify(body),
        });
        busy = false;
        document.getElementById('form-submit').disabled = false;
        if (!res.ok) {
          const data = await res.json();
          document.getElementById('form-error').textContent = data.detail;
          return;
        }
        closeForm();
      }
      async function removeGuest(g) {
        if (busy || !g) {
          return;
        }
        if (!confirm('Are you sure you want to delete ' + g.first_name + ' ' + g.last_name + '?')) {
          return;
        }
        busy = true;
        const res = await fetch('/guests/' + g.id + '?confirm=true', { method: 'DELETE' });
        busy = false;
        if (!res.ok) {
          const data = await res.json();
          document.getElementById('form-error').textContent = data.detail;
          return;
        }
        closeForm();
      }
      loadGuests();
    </script>
  </body>
</html>
"""
