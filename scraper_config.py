"""
Configuration settings for the Câmara de Maceió payroll scraper.
"""

# Listing page with the payroll disclosure links
# The page number is appended as "&pagina=<N>"
LISTING_URL = "https://www.camarademaceio.al.gov.br/transparencia/portal/salarios-subsidiosx"

# Query parameter holding the listing page number
PAGE_PARAM = "pagina"

# First listing page to request
START_PAGE = 1

# Maximum listing pages to walk (None = until a page has no links)
MAX_PAGES = None

# Links to payroll item pages live in the onclick attribute of listing rows
LINK_PATTERN = r"http.*ano=\d*"

# Browser profile used by curl_cffi to impersonate a real client
IMPERSONATE = "chrome120"

# Request timeout in seconds (None = wait forever)
REQUEST_TIMEOUT = 60

# CSV header for extracted payroll records, in table row order
CSV_HEADER = [
    "matricula", "mes", "ano", "vinculo", "nome", "cargo",
    "lotacao", "remuneracao", "abono", "eventuais", "desconto",
    "salario_liquido",
]

# Labels whose values are currency strings like "R$ 1.234,56"
MONEY_LABELS = {
    "Abono",
    "Remuneração",
    "Eventuais",
    "Desconto",
    "Salário Líquido",
}

# Label whose value holds two fields separated by " / "
REFERENCE_LABEL = "Referência"
REFERENCE_SEPARATOR = " / "

# Labels dropped from the output
SKIPPED_LABELS = {"CPF"}
