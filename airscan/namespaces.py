# (c) Copyright Datacraft, 2026
"""XML namespaces used by eSCL documents."""

# Scan specific elements
NS_SCAN = 'http://schemas.hp.com/imaging/escl/2011/05/03'
# Generic PWG semantic model elements
NS_PWG = 'http://www.pwg.org/schemas/2010/12/sm'

PREFIXES = {
	NS_SCAN: 'scan',
	NS_PWG: 'pwg',
}
