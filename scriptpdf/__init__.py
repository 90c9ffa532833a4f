from scriptpdf.screenplay import Screenplay, generatePDF, generatePML
