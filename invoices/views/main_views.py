"""
Authentication and Dashboard Views
Login, signup and logout flows plus the signed-in overview.
"""
from django.contrib.auth.decorators import login_required
from django.db.models import Count, Q, Sum
from django.shortcuts import redirect, render
from django.views.decorators.csrf import csrf_protect
from django.views.decorators.http import require_POST
from django_ratelimit.decorators import ratelimit

from .. import actions
from ..auth_services import AuthService
from ..forms import LoginForm, SignUpForm
from ..models import Invoice
from ..services import InvoiceService


def landing_view(request):
    if request.user.is_authenticated:
        return redirect('invoices:dashboard')
    return render(request, "pages/landing.html")


def custom_404_view(request, exception=None):
    return render(request, "404.html", status=404)


def custom_500_view(request):
    return render(request, "500.html", status=500)


@csrf_protect
@ratelimit(key='ip', rate='10/m', method='POST', block=True)
def login_view(request):
    """
    Credentials sign-in.

    A successful POST never returns here: the gateway navigates to the
    ``redirectTo`` target (or the dashboard) and the middleware turns that
    into the redirect response.
    """
    if request.user.is_authenticated and request.method != 'POST':
        return redirect('invoices:dashboard')

    error_message = None
    if request.method == 'POST':
        form = LoginForm(request.POST)
        error_message = actions.authenticate(None, request.POST, auth=AuthService(request))
        if not form.is_valid():
            form.add_error_class()
    else:
        form = LoginForm(initial={'redirectTo': request.GET.get('next', '')})

    return render(request, 'pages/auth/login.html', {
        'form': form,
        'error_message': error_message,
    })


@csrf_protect
@ratelimit(key='ip', rate='10/m', method='POST', block=True)
def signup_view(request):
    if request.user.is_authenticated and request.method != 'POST':
        return redirect('invoices:dashboard')

    state = None
    if request.method == 'POST':
        form = SignUpForm(request.POST)
        if form.is_valid():
            state = actions.sign_up(form.action_fields(), auth=AuthService(request))
            if state.user is not None:
                return redirect(state.redirect_url or actions.DASHBOARD_PATH)
        else:
            form.add_error_class()
    else:
        form = SignUpForm()

    return render(request, 'pages/auth/signup.html', {
        'form': form,
        'state': state,
        'errors': state.errors if state else {},
    })


@require_POST
def logout_view(request):
    AuthService(request).sign_out()


@login_required
def dashboard(request):
    totals = Invoice.objects.aggregate(
        invoice_count=Count('id'),
        paid_cents=Sum('amount', filter=Q(status=Invoice.Status.PAID)),
        pending_cents=Sum('amount', filter=Q(status=Invoice.Status.PENDING)),
    )
    latest = [InvoiceService.as_row(invoice) for invoice in Invoice.objects.order_by('-date', 'id')[:5]]

    context = {
        'invoice_count': totals['invoice_count'],
        'total_paid': (totals['paid_cents'] or 0) / 100,
        'total_pending': (totals['pending_cents'] or 0) / 100,
        'latest_invoices': latest,
        'page_title': 'Dashboard',
    }
    return render(request, 'pages/dashboard.html', context)
