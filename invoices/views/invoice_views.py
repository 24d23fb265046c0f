import logging

from django.conf import settings
from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.core.paginator import Paginator
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_POST

from ..actions import DELETE_FAILED_MESSAGE, INVOICES_PATH, create_invoice, delete_invoice, update_invoice
from ..cache import PathCache
from ..models import Invoice
from ..services import InvoiceService

logger = logging.getLogger(__name__)


def _listing_rows(query: str) -> list:
    """Listing rows for ``query``, served from the path cache when fresh."""
    view_cache = PathCache()
    variant = f"query={query}"

    rows = view_cache.get(INVOICES_PATH, variant)
    if rows is None:
        rows = [InvoiceService.as_row(invoice) for invoice in InvoiceService.search(query or None)]
        view_cache.set(INVOICES_PATH, rows, variant)
        logger.debug(f"Listing cache miss for {variant!r} ({len(rows)} rows)")
    return rows


def _form_context(state, form_data, *, is_edit, invoice=None):
    return {
        'state': state,
        'errors': state.errors if state else {},
        'form_data': form_data,
        'statuses': Invoice.Status.choices,
        'invoice': invoice,
        'is_edit': is_edit,
        'page_title': 'Edit Invoice' if is_edit else 'Create Invoice',
    }


@login_required
def invoice_list(request):
    search_query = request.GET.get('query', '').strip()
    page = request.GET.get('page', 1)

    paginator = Paginator(_listing_rows(search_query), settings.INVOICES_PER_PAGE)
    invoices_page = paginator.get_page(page)

    context = {
        'invoices': invoices_page,
        'search_query': search_query,
        'page_title': 'Invoices',
    }
    return render(request, "pages/invoices/list.html", context)


@login_required
def invoice_create(request):
    state = None
    form_data = {}

    if request.method == 'POST':
        form_data = request.POST
        # Returns only on failure; success navigates to the listing.
        state = create_invoice(None, request.POST)

    return render(request, "pages/invoices/form.html", _form_context(state, form_data, is_edit=False))


@login_required
def invoice_edit(request, invoice_id):
    invoice = get_object_or_404(Invoice, id=invoice_id)
    state = None

    if request.method == 'POST':
        form_data = request.POST
        state = update_invoice(invoice.id, None, request.POST)
    else:
        form_data = {
            'customerId': invoice.customer_id,
            'amount': f"{invoice.amount_display:.2f}",
            'status': invoice.status,
        }

    return render(
        request,
        "pages/invoices/form.html",
        _form_context(state, form_data, is_edit=True, invoice=invoice),
    )


@login_required
@require_POST
def invoice_delete(request, invoice_id):
    state = delete_invoice(invoice_id)
    if state.message == DELETE_FAILED_MESSAGE:
        messages.error(request, state.message)
    else:
        messages.success(request, state.message)
    return redirect('invoices:invoice_list')
