from catalog_probe.models import HTTP_OK, Classification


def classify(page_status, image_status, search_status):
    """
    Map the three statuses of one code to a Classification.

    Rules, first match wins:
    - page != 200, image == 200                  -> DISCONTINUED_OR_REDIRECTED
    - page == 200, image == 200, search != 200   -> OUT_OF_STOCK_OR_HIDDEN
    - anything else                              -> NORMAL
    """
    if page_status != HTTP_OK and image_status == HTTP_OK:
        return Classification.DISCONTINUED_OR_REDIRECTED
    if page_status == HTTP_OK and image_status == HTTP_OK and search_status != HTTP_OK:
        return Classification.OUT_OF_STOCK_OR_HIDDEN
    return Classification.NORMAL


def classify_signals(signals):
    return classify(signals.page.status, signals.image.status, signals.search.status)
