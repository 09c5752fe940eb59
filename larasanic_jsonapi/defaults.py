"""
JSON:API Default Values
Route parameter names, action verbs and middleware names shared by the
route compiler and the request interpreter.
"""

# ============================================================================
# ROUTE PARAMETERS
# ============================================================================

PARAM_RESOURCE_TYPE = 'resource_type'
PARAM_RESOURCE_ID = 'resource_id'
PARAM_RELATIONSHIP_NAME = 'relationship_name'

KEYWORD_RELATIONSHIPS = 'relationships'

# ============================================================================
# RESOURCE ACTIONS
# ============================================================================

# Order matters: routes are registered in this order
RESOURCE_VERBS = ['index', 'create', 'read', 'update', 'delete']

RESOURCE_METHODS = {
    'index': 'GET',
    'create': 'POST',
    'read': 'GET',
    'update': 'PATCH',
    'delete': 'DELETE',
}

HAS_ONE_ACTIONS = ['related', 'read', 'replace']
HAS_MANY_ACTIONS = ['related', 'read', 'replace', 'add', 'remove']

RELATIONSHIP_METHODS = {
    'related': 'GET',
    'read': 'GET',
    'replace': 'PATCH',
    'add': 'POST',
    'remove': 'DELETE',
}

RELATIONSHIP_CONTROLLER_METHODS = {
    'related': 'read_related_resource',
    'read': 'read_relationship',
    'replace': 'replace_relationship',
    'add': 'add_to_relationship',
    'remove': 'remove_from_relationship',
}

HTTP_METHODS = ['GET', 'HEAD', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS']

# ============================================================================
# MIDDLEWARE
# ============================================================================

MIDDLEWARE_AUTHORIZE = 'json-api.authorize'
MIDDLEWARE_VALIDATE = 'json-api.validate'

# ============================================================================
# HTTP
# ============================================================================

MEDIA_TYPE = 'application/vnd.api+json'

# Attribute on request.ctx holding the matched route context
REQUEST_CONTEXT_KEY = 'json_api'

# Config file read by ApiDefaults.from_config()
DEFAULT_CONFIG_NAME = 'json_api'
