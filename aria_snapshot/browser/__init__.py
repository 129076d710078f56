from aria_snapshot.browser.locators import PlaywrightLocatorBackend

__all__ = ['PlaywrightLocatorBackend']
