from seoredirects.services.redirect_service import RedirectService, SaveResult


__all__ = ['RedirectService', 'SaveResult']
