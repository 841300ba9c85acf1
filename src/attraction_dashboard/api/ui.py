"""Single-page dashboard UI that consumes the JSON API."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from attraction_dashboard.api.dependencies import get_container

router = APIRouter(tags=["ui"])


@router.get("/", response_class=HTMLResponse)
async def dashboard_ui(request: Request) -> HTMLResponse:
    """Serve the dashboard page pointed at the configured API prefix."""
    api_prefix = get_container(request).settings.api_prefix.rstrip("/")
    return HTMLResponse(_DASHBOARD_UI_HTML.replace("__API_PREFIX__", api_prefix))


_DASHBOARD_UI_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Attraction Dashboard</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      .row { margin-bottom: 1rem; }
      .hidden { display: none; }
      input, select { padding: 0.3rem 0.5rem; margin-right: 0.5rem; }
      button { padding: 0.3rem 0.7rem; margin-right: 0.3rem; }
      table { border-collapse: collapse; width: 100%; }
      th, td { border-bottom: 1px solid #ddd; padding: 0.4rem; text-align: left; }
      #banner { background: #f6f6f6; padding: 0.5rem 1rem; min-height: 1.2rem; }
      fieldset { margin-bottom: 1rem; }
    </style>
  </head>
  <body>
    <h1>Attraction Dashboard</h1>
    <div id="banner"></div>

    <section id="login-view">
      <div class="row">
        <input id="username" placeholder="Username" />
        <input id="password" type="password" placeholder="Password" />
        <button onclick="login()">Log in</button>
      </div>
    </section>

    <section id="app-view" class="hidden">
      <div class="row">
        <span id="current-user"></span>
        <button onclick="logout()">Log out</button>
      </div>

      <fieldset>
        <legend>Filters</legend>
        <input id="start-date" type="date" />
        <input id="end-date" type="date" />
        <select id="attraction-filter"></select>
        <button onclick="loadData()">Apply</button>
      </fieldset>

      <div class="row" id="summary"></div>

      <fieldset>
        <legend id="record-legend">Add daily data</legend>
        <input id="record-id" type="hidden" />
        <select id="record-attraction"></select>
        <input id="record-date" type="date" />
        <input id="record-qrcodes" type="number" min="0" placeholder="QR codes" />
        <input id="record-sales" type="number" min="0" placeholder="Sales" />
        <button onclick="saveRecord()">Save</button>
        <button onclick="resetRecordForm()">Clear</button>
      </fieldset>

      <fieldset>
        <legend>Attractions</legend>
        <input id="attraction-name" placeholder="Attraction name" />
        <button onclick="addAttraction()">Add</button>
        <ul id="attraction-list"></ul>
      </fieldset>

      <table>
        <thead>
          <tr>
            <th>Date</th><th>Attraction</th><th>QR codes</th>
            <th>Sales</th><th>Conversion</th><th></th>
          </tr>
        </thead>
        <tbody id="rows"></tbody>
      </table>
    </section>

    <script>
      const API = '__API_PREFIX__';
      let rowsById = {};

      function $(id) { return document.getElementById(id); }

      function showMessage(text) { $('banner').textContent = text || ''; }

      async function api(path, options = {}) {
        const res = await fetch(API + path, {
          ...options,
          headers: {
            'Authorization': 'Bearer ' + (localStorage.getItem('token') || ''),
            'Content-Type': 'application/json',
          },
        });
        const data = await res.json();
        if (res.status === 401 && path !== '/login') { logout(); }
        if (!res.ok) { throw new Error(data.error || ('Error ' + res.status)); }
        return data;
      }

      async function login() {
        try {
          const data = await api('/login', {
            method: 'POST',
            body: JSON.stringify({
              username: $('username').value,
              password: $('password').value,
            }),
          });
          localStorage.setItem('token', data.token);
          localStorage.setItem('user', data.user.username);
          showMessage('');
          start();
        } catch (err) { showMessage(err.message); }
      }

      function logout() {
        localStorage.removeItem('token');
        localStorage.removeItem('user');
        $('app-view').classList.add('hidden');
        $('login-view').classList.remove('hidden');
      }

      function filterQuery() {
        const params = new URLSearchParams();
        if ($('start-date').value) params.append('startDate', $('start-date').value);
        if ($('end-date').value) params.append('endDate', $('end-date').value);
        const attraction = $('attraction-filter').value;
        if (attraction && attraction !== 'all') params.append('attractionId', attraction);
        return params.toString();
      }

      async function loadAttractions() {
        const attractions = await api('/attractions');
        const options = attractions.map(
          (a) => '<option value="' + a.id + '">' + escapeHtml(a.name) + '</option>'
        ).join('');
        const selected = $('attraction-filter').value || 'all';
        $('attraction-filter').innerHTML =
          '<option value="all">All attractions</option>' + options;
        $('attraction-filter').value = selected;
        $('record-attraction').innerHTML = options;
        $('attraction-list').innerHTML = attractions.map(
          (a) => '<li>' + escapeHtml(a.name) +
            ' <button onclick="deleteAttraction(' + a.id + ')">Delete</button></li>'
        ).join('');
      }

      async function loadData() {
        try {
          const query = filterQuery();
          const [rows, summary] = await Promise.all([
            api('/dashboard-data?' + query),
            api('/summary?' + query),
          ]);
          rowsById = {};
          $('rows').innerHTML = rows.map((row) => {
            rowsById[row.id] = row;
            return '<tr><td>' + row.date + '</td><td>' +
              escapeHtml(row.attraction_name) + '</td><td>' +
              row.qrcodes_delivered + '</td><td>' + row.sales_made + '</td><td>' +
              row.conversion_rate.toFixed(2) + '%</td><td>' +
              '<button onclick="editRecord(' + row.id + ')">Edit</button>' +
              '<button onclick="deleteRecord(' + row.id + ')">Delete</button>' +
              '</td></tr>';
          }).join('');
          $('summary').textContent =
            'Days: ' + summary.total_days +
            ' | QR codes: ' + summary.total_qrcodes +
            ' | Sales: ' + summary.total_sales +
            ' | Conversion: ' + summary.avg_conversion_rate.toFixed(2) + '%';
        } catch (err) { showMessage(err.message); }
      }

      function resetRecordForm() {
        $('record-id').value = '';
        $('record-date').value = '';
        $('record-qrcodes').value = '';
        $('record-sales').value = '';
        $('record-legend').textContent = 'Add daily data';
      }

      function editRecord(id) {
        const row = rowsById[id];
        $('record-id').value = row.id;
        $('record-attraction').value = row.attraction_id;
        $('record-date').value = row.date;
        $('record-qrcodes').value = row.qrcodes_delivered;
        $('record-sales').value = row.sales_made;
        $('record-legend').textContent = 'Edit daily data';
      }

      async function saveRecord() {
        const id = $('record-id').value;
        const body = JSON.stringify({
          attractionId: parseInt($('record-attraction').value, 10),
          date: $('record-date').value,
          qrcodesDelivered: parseInt($('record-qrcodes').value || '0', 10),
          salesMade: parseInt($('record-sales').value || '0', 10),
        });
        try {
          const result = id
            ? await api('/daily-data/' + id, { method: 'PUT', body })
            : await api('/daily-data', { method: 'POST', body });
          showMessage(result.message);
          resetRecordForm();
          loadData();
        } catch (err) { showMessage(err.message); }
      }

      async function deleteRecord(id) {
        if (!confirm('Delete this record?')) return;
        try {
          const result = await api('/daily-data/' + id, { method: 'DELETE' });
          showMessage(result.message);
          loadData();
        } catch (err) { showMessage(err.message); }
      }

      async function addAttraction() {
        try {
          await api('/attractions', {
            method: 'POST',
            body: JSON.stringify({ name: $('attraction-name').value.trim() }),
          });
          $('attraction-name').value = '';
          showMessage('Attraction added');
          loadAttractions();
        } catch (err) { showMessage(err.message); }
      }

      async function deleteAttraction(id) {
        if (!confirm('Delete this attraction?')) return;
        try {
          const result = await api('/attractions/' + id, { method: 'DELETE' });
          showMessage(result.message);
          loadAttractions();
        } catch (err) { showMessage(err.message); }
      }

      function escapeHtml(text) {
        const node = document.createElement('span');
        node.textContent = text;
        return node.innerHTML;
      }

      async function start() {
        $('login-view').classList.add('hidden');
        $('app-view').classList.remove('hidden');
        $('current-user').textContent = localStorage.getItem('user') || '';
        try {
          await loadAttractions();
          await loadData();
        } catch (err) { showMessage(err.message); }
      }

      if (localStorage.getItem('token')) { start(); }
    </script>
  </body>
</html>
"""
