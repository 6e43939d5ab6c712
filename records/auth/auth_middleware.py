from functools import wraps
from flask_jwt_extended import get_jwt, verify_jwt_in_request
from flask_jwt_extended.exceptions import JWTExtendedException, NoAuthorizationError
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError
from records.config.settings import ADMIN_ROLE

def role_required(*allowed_roles):
    """Decorator to require specific roles for API endpoints"""
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            try:
                verify_jwt_in_request()
                claims = get_jwt()
            except NoAuthorizationError:
                return {"message": "Missing Authorization Header", "error": "NO_AUTH_HEADER"}, 401
            except ExpiredSignatureError:
                return {"message": "Token has expired", "error": "TOKEN_EXPIRED"}, 401
            except (InvalidTokenError, JWTExtendedException):
                return {"message": "Invalid token", "error": "INVALID_TOKEN"}, 401

            if claims.get("role") not in allowed_roles:
                return {"message": f"Access denied. Required roles: {', '.join(allowed_roles)}", "error": "INSUFFICIENT_PERMISSIONS"}, 403

            return f(*args, **kwargs)
        return decorated_function
    return decorator

def admin_required(f):
    """Decorator for admin-only endpoints"""
    return role_required(ADMIN_ROLE)(f)
