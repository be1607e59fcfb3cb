"""
ACL Policies
==============
Policy modules expose `register_policies(acl)` and are listed in
settings.ACL_POLICY_MODULES. They run once at startup.
"""
