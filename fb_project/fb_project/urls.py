# The statement engine has no HTTP surface of its own;
# the UI layer mounts its own routes on top of ledger_core.services
urlpatterns = []
