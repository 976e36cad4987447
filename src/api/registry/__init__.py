"""Registry bounded context.

Owns launchable resources, categories, client workspaces with their
membership sets, and the dashboard widget layout of each owner.
"""
