from .auth import auth_bp, diagnostics_bp
from .bookings import bookings_bp
from .customer_auth import customer_auth_bp
from .customers import customers_bp
from .puja_types import puja_types_bp


def register_blueprints(app):
    app.register_blueprint(auth_bp)
    app.register_blueprint(customer_auth_bp)
    app.register_blueprint(customers_bp)
    app.register_blueprint(puja_types_bp)
    app.register_blueprint(bookings_bp)

    # Development-only helper; never enabled by default
    if app.config.get("ENABLE_DIAGNOSTICS"):
        app.logger.warning("Diagnostic endpoints enabled - do not run this configuration in production")
        app.register_blueprint(diagnostics_bp)
