"""Output templates for the generated Dart localization file.

Templates are immutable module constants. Each contains a small fixed set of
``${token}`` markers that CodeRenderer fills in a single pass:

    CANONICAL_TEMPLATE  ${functions}
    LOCALE_TEMPLATE     ${locale} ${derived} ${textDirection} ${functions}
    REGISTRY_TEMPLATE   ${locales} ${cases}

Any other ``$`` in the templates is Dart syntax and is left untouched.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "CANONICAL_TEMPLATE",
    "CASE_TEMPLATE",
    "DEFAULT_TEMPLATES",
    "LOCALE_ENTRY_TEMPLATE",
    "LOCALE_TEMPLATE",
    "REGISTRY_TEMPLATE",
    "RenderTemplates",
]

CANONICAL_TEMPLATE: str = """\
import 'dart:async';

import 'package:flutter/foundation.dart';
import 'package:flutter/material.dart';

// ignore_for_file: non_constant_identifier_names
// ignore_for_file: camel_case_types
// ignore_for_file: prefer_single_quotes
// ignore_for_file: unnecessary_brace_in_string_interps

// This file is automatically generated. DO NOT EDIT, all your changes would be lost.
class S implements WidgetsLocalizations {
  const S();

  static S current;

  static const GeneratedLocalizationsDelegate delegate =
    GeneratedLocalizationsDelegate();

  static S of(BuildContext context) => Localizations.of<S>(context, S);

  @override
  TextDirection get textDirection => TextDirection.ltr;

${functions}
}
"""

LOCALE_TEMPLATE: str = """\

class $${locale} extends ${derived} {
  const $${locale}();

  @override
  TextDirection get textDirection => TextDirection.${textDirection};

${functions}
}
"""

REGISTRY_TEMPLATE: str = """\

class GeneratedLocalizationsDelegate extends LocalizationsDelegate<S> {
  const GeneratedLocalizationsDelegate();

  List<Locale> get supportedLocales {
    return const <Locale>[
${locales}
    ];
  }

  LocaleListResolutionCallback listResolution({Locale fallback, bool withCountry = true}) {
    return (List<Locale> locales, Iterable<Locale> supported) {
      if (locales == null || locales.isEmpty) {
        return fallback ?? supported.first;
      } else {
        return _resolve(locales.first, fallback, supported, withCountry);
      }
    };
  }

  LocaleResolutionCallback resolution({Locale fallback, bool withCountry = true}) {
    return (Locale locale, Iterable<Locale> supported) {
      return _resolve(locale, fallback, supported, withCountry);
    };
  }

  @override
  Future<S> load(Locale locale) {
    final String lang = getLang(locale);
    if (lang != null) {
      switch (lang) {
${cases}
        default:
          // NO-OP.
      }
    }
    S.current = const S();
    return SynchronousFuture<S>(S.current);
  }

  @override
  bool isSupported(Locale locale) => _isSupported(locale, false);

  @override
  bool shouldReload(GeneratedLocalizationsDelegate old) => false;

  Locale _resolve(Locale locale, Locale fallback, Iterable<Locale> supported, bool withCountry) {
    if (locale == null || !_isSupported(locale, withCountry)) {
      return fallback ?? supported.first;
    }

    final Locale languageLocale = Locale(locale.languageCode, "");
    if (supported.contains(locale)) {
      return locale;
    } else if (supported.contains(languageLocale)) {
      return languageLocale;
    } else {
      final Locale fallbackLocale = fallback ?? supported.first;
      return fallbackLocale;
    }
  }

  bool _isSupported(Locale locale, bool withCountry) {
    if (locale != null) {
      for (Locale supportedLocale in supportedLocales) {
        if (supportedLocale.languageCode != locale.languageCode) {
          continue;
        }
        if (supportedLocale.countryCode == locale.countryCode) {
          return true;
        }
        if (!withCountry) {
          return true;
        }
      }
    }
    return false;
  }
}

String getLang(Locale l) => l == null
  ? null
  : l.countryCode != null && l.countryCode.isEmpty
    ? l.languageCode
    : l.toString();
"""

# One entry of the supportedLocales list.
LOCALE_ENTRY_TEMPLATE: str = '${indent}Locale("${language}", "${country}"),'

# One branch of the load() switch.
CASE_TEMPLATE: str = """\
${indent}case "${match}":
${indent}  S.current = const $${locale}();
${indent}  return SynchronousFuture<S>(S.current);"""


@dataclass(frozen=True, slots=True)
class RenderTemplates:
    """Template set injected into CodeRenderer.

    Attributes:
        canonical: Canonical class template
        locale: Per-locale class template
        registry: Locale registry / dispatch class template
        locale_entry: supportedLocales entry template
        case: load() switch branch template
    """

    canonical: str = CANONICAL_TEMPLATE
    locale: str = LOCALE_TEMPLATE
    registry: str = REGISTRY_TEMPLATE
    locale_entry: str = LOCALE_ENTRY_TEMPLATE
    case: str = CASE_TEMPLATE


DEFAULT_TEMPLATES: RenderTemplates = RenderTemplates()
