from seoredirects.dao.file.redirect_file_dao import RedirectFileDAO


__all__ = ['RedirectFileDAO']
