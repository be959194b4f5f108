# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# - models/: Pydantic schemas (Book, FormSubmission, UserRecord)
# - services/: Library catalog and user lookup
#
# Routers in app/ stay thin and delegate here.
# =============================================================================
